"""
Web interface for the biodata PDF service.
"""
