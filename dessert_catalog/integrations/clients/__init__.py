"""
Integration clients: real HTTP transport and local stand-ins.
"""
