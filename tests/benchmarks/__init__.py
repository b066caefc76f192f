"""Benchmarks package — uses pytest-benchmark.

Run with::

    pytest tests/benchmarks/bench_failure_interpreter.py -v
    pytest tests/benchmarks/bench_failure_interpreter.py -v --benchmark-sort=median

To run as plain functional tests without benchmark overhead::

    pytest tests/benchmarks/bench_failure_interpreter.py --benchmark-disable
"""
