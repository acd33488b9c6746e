"""
Test suite for Consultorio Turnos.

Contains unit and integration tests for the application's functionality.
"""
import os
import tempfile

# Set environment for testing
os.environ["TESTING"] = "1"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="consultorio-test-"))
