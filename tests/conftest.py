"""Root conftest - shared test configuration."""

import os
import tempfile

# Importing calculator.main builds the module-level app, which opens log files;
# keep them out of the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="calculator-logs-"))
