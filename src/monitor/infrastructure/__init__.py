"""
Infrastructure layer: camera sources and realtime broadcasting.
"""
