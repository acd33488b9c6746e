"""
Consultorio Turnos

A small FastAPI backend for booking appointments with a single practitioner,
backed by two JSON documents on local disk.
"""

__version__ = "1.0.0"
