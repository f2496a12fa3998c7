"""Log metadata and carrying it in a request context."""