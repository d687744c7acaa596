"""Boarding order policy tests"""
