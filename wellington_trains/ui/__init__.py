"""
User interface package for the Wellington Trains application.
"""
