"""Utility modules: configuration, exceptions and logging"""
