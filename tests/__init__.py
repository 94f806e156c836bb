import os

# Keep test runs from writing logs/app.log
os.environ.setdefault('ADDRESS_RESOLVER_LOG_TO_FILE', '0')
