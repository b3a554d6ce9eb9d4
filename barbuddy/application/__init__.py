"""Application layer.

Services that orchestrate platform ports and the error reporter on behalf of the
host app (watch lifecycle, composition root).

Rule of thumb:
UI -> application -> core
"""
