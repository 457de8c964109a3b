import os

# Backend no interactivo para Matplotlib
os.environ.setdefault("MPLBACKEND", "Agg")
