"""Service layer: adapts domain conversions to the ServiceResult contract.

Services never print. Adapters (the CLI today) render whatever the
services return.
"""
