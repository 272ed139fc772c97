"""Label Lookup API services"""
