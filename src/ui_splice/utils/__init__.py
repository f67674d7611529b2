"""
Utility helpers shared by the CLI and the core pipeline.
"""
