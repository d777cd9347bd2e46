"""
Mock integration clients.

These clients keep data in memory and never call an external API.
They are used when:
- No Notion workspace/token is available (INTEGRATIONS_MODE=mock)
- We want to test the sync end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients
  (src/integrations/contracts/notion.py).
"""
