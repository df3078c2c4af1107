"""
Utility helpers for the Wellington Trains application.
"""
