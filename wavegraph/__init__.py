# wavegraph/__init__.py
"""Signal-processing block graph with a discrete wavelet transform kernel."""
