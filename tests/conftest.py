# Ensure the project root is on sys.path so tests can import `Cores` without an editable install
import os
import sys
import tempfile

HERE = os.path.dirname(__file__)
ROOT = os.path.abspath(os.path.join(HERE, ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Keep test runs from writing into the project's Logs/ and Data/ folders
_TMP = tempfile.mkdtemp(prefix="rxmarbles-tests-")
os.environ.setdefault("RXMARBLES_LOG_DIR", os.path.join(_TMP, "Logs"))
os.environ.setdefault("RXMARBLES_DATA_DIR", os.path.join(_TMP, "Data"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
