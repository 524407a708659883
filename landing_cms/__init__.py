"""
Landing CMS - content backend for a single-page marketing site.

Stores the page content as one JSON document, serves it over a small
FastAPI application, and lets a single editor replace it and upload
gallery images.
"""
