"""Route tables, one module per concern, registered once in ``gke_demo.main``."""
