"""
Hospital Ward Service

In-memory hospital directory with room allocation, surgeon scheduling and
the patient check-in / check-out lifecycle.
"""

__version__ = "1.0.0"
