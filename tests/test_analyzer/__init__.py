"""Analyzer tests"""
