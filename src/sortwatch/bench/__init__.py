"""Benchmarking: the single-call timer, repeated sampling, and the CLIs built on them."""
