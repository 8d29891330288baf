"""
Application Layer - Use Cases and Orchestration

Responsibility:
    Loads pricing data through the domain repository protocols and composes
    the domain resolvers into quotes and configuration checks.

Contains:
    - config: Environment loading (python-dotenv) and logging setup
    - services: Quote and segmentation validation services

Does NOT contain:
    - Domain business rules (belongs to Domain layer)
    - Storage details (belongs to Infrastructure layer)
"""
