"""
Benchmark: Recording Throughput

Measures the cost of a recording call on the buffering client, alone and
under thread contention. The transport discards datagrams, so the numbers
isolate formatting, sampling, locking and buffering overhead.

Usage:
    uv run pytest benchmarks/test_bench_record_throughput.py -v -s --no-cov
"""

import random
import statistics
import threading
import time
from typing import List, Tuple

from buffered_statsd.reporters.buffered import StatsdClient


class TestRecordThroughput:
    """Measure per-call overhead of recording operations."""

    def test_single_thread_count(self, bench_client, null_transport):
        """
        Time count() in a tight loop.

        Reports calls per second and the resulting packet count, which
        shows how well lines are being packed.
        """
        calls = 50_000
        round_times = []

        for _ in range(3):
            start = time.perf_counter()
            for i in range(calls):
                bench_client.count("requests.total", i)
            round_times.append(time.perf_counter() - start)
        bench_client.flush()

        best = min(round_times)
        print(f"\ncount(): {calls / best:,.0f} calls/s (best of 3)")
        print(f"packets: {null_transport.packets}, bytes: {null_transport.bytes}")

        assert null_transport.packets > 0
        assert null_transport.bytes / null_transport.packets <= 512

    def test_sampled_count(self, null_transport):
        """Sampled-out calls skip formatting and buffering entirely."""
        client = StatsdClient(null_transport, rng=random.Random(7))
        calls = 50_000

        start = time.perf_counter()
        for _ in range(calls):
            client.count("requests.sampled", 1, 0.01)
        elapsed = time.perf_counter() - start
        client.flush()

        print(f"\nsampled count(): {calls / elapsed:,.0f} calls/s at rate 0.01")
        assert null_transport.packets > 0

    def test_scaling_with_threads(self, null_transport):
        """
        Measure throughput with increasing numbers of recording threads.

        Every call takes the buffer lock, so this shows lock contention.
        """
        client = StatsdClient(null_transport)
        per_thread = 10_000
        results: List[Tuple[int, float]] = []

        for thread_count in [1, 2, 4, 8]:
            barrier = threading.Barrier(thread_count + 1)

            def worker() -> None:
                barrier.wait()
                for i in range(per_thread):
                    client.timing("latency", i * 0.5)

            threads = [threading.Thread(target=worker) for _ in range(thread_count)]
            for thread in threads:
                thread.start()
            barrier.wait()
            start = time.perf_counter()
            for thread in threads:
                thread.join()
            elapsed = time.perf_counter() - start
            results.append((thread_count, thread_count * per_thread / elapsed))

        client.flush()

        print("\nthreads | calls/s")
        for thread_count, rate in results:
            print(f"{thread_count:7d} | {rate:,.0f}")
        print(f"median: {statistics.median(rate for _, rate in results):,.0f} calls/s")

        assert all(rate > 0 for _, rate in results)
