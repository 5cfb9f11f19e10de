"""Shared helpers: logging, path resolution, configuration"""
