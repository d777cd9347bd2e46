"""
Contracts (data models).

Defines the operations and shapes shared by the Notion clients:
- NotionStore: query / create / update of database pages
- NotionPage: a page as returned by Notion
- NotionAPIError / APIErrorCode: machine-readable Notion failures

Both mock and real HTTP clients implement these contracts.
"""
