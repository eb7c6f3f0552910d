"""Employee Directory package.

This package is organized by feature modules (commands, directory, console,
stats, text) with a thin console controller layer over service/repository
layers.
"""
