"""
Calldata Playground - interactive front-end for the game token calldata API.

Pick an endpoint, fill in its form and send it. In demo mode responses are
fabricated locally; in live mode they come from the upstream API.

Features:
- One form per API endpoint (approve, lock, create/burn token, flows)
- Request preview (URL, method, JSON body)
- Pass-through proxy for / and /api/* to the upstream API
- Static UI with index.html fallback

Usage:
    calldata-playground --port 8080 --api-url http://localhost:8000

Or:
    uvicorn playground.app:app --port 8080
"""
