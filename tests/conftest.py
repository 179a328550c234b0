import os

# Auth is on for tests unless a test patches APIKEY_AUTH_DISABLED
os.environ.pop("APIKEY_AUTH_DISABLED", None)
os.environ.pop("APIKEY_AUTH_PUBLIC_PATHS", None)
