"""WSGI middleware that attaches a trace ID to every request."""