"""
PktProbe core: port sets, capture access and payload templates
"""
