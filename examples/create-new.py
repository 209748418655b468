# This is a simple program to show how to use isowrap to create a new
# ISO, with two files in its root directory.

# Import standard python modules.
import sys
from io import BytesIO

# Import isowrap itself.
import isowrap

# Check that there are enough command-line arguments.
if len(sys.argv) != 1:
    print('Usage: %s' % (sys.argv[0]))
    sys.exit(1)

# Create a new IsoWrap object.
iso = isowrap.IsoWrap()

# Create a new ISO.  The volume identifier is picked when the ISO is written;
# pass vol_ident to choose one, and tm to get the same bytes on every run.
iso.new()

# Add a new file to the ISO, with the contents coming from the file object.
# Note that the file object must remain open until the ISO has been written,
# as the data is only read then.  The name is what the file is called on the
# final ISO; only A-Z, 0-9, _ and . are allowed, and isowrap will raise an
# IsoWrapInvalidInput exception for anything else (including lower case).
foostr = b'foo\n'
iso.add_fp(BytesIO(foostr), len(foostr), 'FOO.TXT')

barstr = b'bar\n' * 1000
iso.add_fp(BytesIO(barstr), len(barstr), 'BAR.TXT')

# Write out the ISO to the file called 'new.iso'.  The file must not exist
# yet.  FOO.TXT lands at sector 21 and BAR.TXT right after it.
iso.write('new.iso')

# Close the ISO object.  After this call, the IsoWrap object has forgotten
# everything about the previous ISO, and can be re-used.
iso.close()
