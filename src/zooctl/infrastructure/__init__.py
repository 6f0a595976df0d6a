"""Infrastructure layer — record files and the activity log sink.

This layer depends only on stdlib.
It must never import from domain, services, commands, or output.
"""
