"""
Dash adapters: layout builders, callbacks and the app factory.
"""
