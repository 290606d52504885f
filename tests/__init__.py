import os
import tempfile

# settings are read at import time, so the test environment is fixed before any storefront import
_tmp = tempfile.mkdtemp(prefix="storefront-tests-")
os.environ.setdefault("JWT_SECRET", "test-signing-secret-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("UPLOAD_DIR", os.path.join(_tmp, "uploads"))
os.environ.setdefault("LOG_DIR", os.path.join(_tmp, "logs"))
os.environ.setdefault("MAIL_HOST", "")
