"""
Use cases of the entity access API.

Routers call these services instead of opening sessions themselves:
- lookup_service: find-all and name search (repository and session styles)
- bulk_loader: save-all and batched flush-and-release inserts
"""
