# This is a simple program to show how to use isowrap to wrap a single file
# from disk in an ISO, the way a cloud-init seed image is built.

# Import standard python modules.
import sys

# Import isowrap itself.
import isowrap

# Check that there are enough command-line arguments.
if len(sys.argv) != 3:
    print('Usage: %s <infile> <outiso>' % (sys.argv[0]))
    sys.exit(1)

# The name on the ISO is the basename of the input in upper case, and is
# also used as the volume identifier.  The output must not exist yet; if
# anything goes wrong the partial output is removed.
isowrap.write_file(sys.argv[2], sys.argv[1])
