"""
hashbench - timing benchmarks for hash algorithm implementations.
"""
