"""
HTTP surface of the trivia gateway.

Routers:
- trivia.router:      POST /api/trivia (event-stream relay)
- suggestions.router: GET /api/suggested-topics
"""
