"""
Test suite for the Neptune openCypher demo.
Drivers and AWS clients are mocked, so no live cluster is needed.
"""
