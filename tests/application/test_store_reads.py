"""Tests for the concurrent read fan-out."""

import threading

import pytest

from ecomarket.application.store_reads import gather_reads
from ecomarket.domain.exceptions import DataAccessError, PermissionDenied


class TestGatherReads:

    def test_results_keyed_by_name(self):
        assert gather_reads({"a": lambda: 1, "b": lambda: [2]}) == {"a": 1, "b": [2]}

    def test_reads_run_concurrently(self):
        barrier = threading.Barrier(2, timeout=5)

        def read():
            barrier.wait()
            return True

        assert gather_reads({"a": read, "b": read}) == {"a": True, "b": True}

    def test_failure_wrapped(self):
        def broken():
            raise OSError("disk gone")

        with pytest.raises(DataAccessError, match="Failed to read b: disk gone"):
            gather_reads({"a": lambda: 1, "b": broken})

    def test_domain_errors_pass_through(self):
        def missing():
            raise PermissionDenied("not yours")

        with pytest.raises(PermissionDenied):
            gather_reads({"a": missing})
