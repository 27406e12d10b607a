"""
The MODEL layer contains pure data structures.
It has NO knowledge of plotting or of how the samples are computed.
It deals with buffers, scenario tags and barrier geometry.
"""
