"""Test configuration for PanLang tests"""

import os

# error messages are compared as plain text
os.environ["NO_COLOR"] = "1"
os.environ.pop("FORCE_COLOR", None)
