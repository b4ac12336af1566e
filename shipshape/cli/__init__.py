"""Command line interface for shipshape"""
