"""
Command line interface for jsoncompare.
"""
