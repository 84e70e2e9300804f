"""
Plugin implementations for branchscout's interfaces.
"""
