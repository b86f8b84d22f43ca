"""Server-rendered admin page.

Kept deliberately thin:
- one Jinja2 page served by the same FastAPI app
- a static script that talks to the /api endpoints with fetch()
"""
