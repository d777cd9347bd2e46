"""
Real HTTP integration clients.

These clients communicate with the Notion REST API over HTTP.

Important:
- Must implement the same interfaces as the mock clients
- Must raise NotionAPIError for Notion error responses

Switching:
The selection of mock vs real clients should happen in src/api/app.py only.
"""
