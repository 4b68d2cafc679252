"""Internal modules for fetchkit.

WARNING: These modules back the public Client and may change without notice.

Modules:
    merge - Recursive configuration merging
    request - Body encoding, XSRF token lookup, URL and query composition
    http - Default httpx transport
    cancel - CancelToken / AbortSignal
    redaction - Header redaction for debug output
"""
