"""
The MODEL layer holds the conversion pipeline: header resolution, row
decoding, the vertex table and PLY emission.
It has NO knowledge of the command line.
"""
