"""
Only the root tests directory is a package; test subdirectories stay plain
directories, so test module names must be unique across the tree.
"""
