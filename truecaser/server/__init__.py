"""HTTP service exposing a trained truecasing model.

WHY: Pipelines written in other languages (ASR post-processing, MT
output cleanup) can call one endpoint instead of embedding Python.

HOW: app.py defines the FastAPI application, models.py its request and
response schemas.
"""
