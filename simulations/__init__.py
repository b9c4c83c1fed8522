# simulations/__init__.py
"""
Monte Carlo sampling-distribution experiments over the sample_means package.

Run the demo via:
    python -m simulations.report --trials 10000 --sample-size 5 --output means.png
"""
