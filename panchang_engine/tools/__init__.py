# Panchang Engine - Orchestration and search tools
