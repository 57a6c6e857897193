"""Console-script wrappers for the support dashboard."""
