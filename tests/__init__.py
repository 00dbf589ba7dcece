import os
import tempfile

# keep test runs out of the package's real debug log
os.environ.setdefault(
    "MOVIELIST_LOG_PATH", os.path.join(tempfile.gettempdir(), "movielist_test_debug.log")
)
