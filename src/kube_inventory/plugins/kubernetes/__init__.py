"""Kubernetes plugin: cluster inventory commands."""
