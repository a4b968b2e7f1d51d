"""HTTP API for the transcript segmenter (FastAPI).

WHY: Lets non-Python callers parse transcripts and export subtitles.

HOW: app.py defines the FastAPI app, models.py its Pydantic schemas.
"""
