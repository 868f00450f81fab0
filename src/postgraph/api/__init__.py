"""HTTP API for the postgraph service"""
