"""Visualizer tests"""
