"""
ctlesc - sentinel-byte quoting for shell word expansion.
"""
