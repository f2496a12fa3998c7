"""Unary gRPC-style interceptors that propagate trace IDs, and call metadata helpers."""