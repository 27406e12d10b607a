"""
The VIEW layer renders buffers for inspection.
It only reads SampleBuffers; it never computes wave functions.
"""
