# Tests import the package as ``src.viewtensor``; the repository root must be
# on sys.path, which pytest guarantees for a rootdir conftest.
