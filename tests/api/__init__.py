"""API tests package.

End-to-end tests for REST API endpoints using TestClient against a freshly
built host application. Tests the complete request/response cycle including:
- Request validation
- Module handler orchestration
- Response formatting
- Error handling (RFC 7807)
- HTTP status codes
"""
