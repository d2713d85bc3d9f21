"""
Services - validation, moderation, masking, export and health checks.
"""
