"""
Exporters for the dialogue graph
"""

from .exporter import DialogueExporter

__all__ = ["DialogueExporter"]
