#!/usr/bin/env python3
"""Core constants for rosa-ops."""

# Managed-service API
DEFAULT_OCM_URL = "https://api.openshift.com"
DEFAULT_OCM_TIMEOUT = 30
OCM_PRODUCT = "ROSA"
QUOTA_WILDCARD = "any"

# AWS Service Constants
AWS_CLOUD_PROVIDER = "aws"
MULTI_AZ_ZONE_COUNT = 3

# Output
OUTPUT_FORMATS = ("json", "yaml")
INSTANCE_TYPE_COLUMNS = ("ID", "CATEGORY", "CPU_CORES", "MEMORY")

# IEC byte formatting
IEC_BASE = 1024
IEC_PREFIXES = "KMGTPE"
BYTE_UNIT = "B"

# Instance family prefix -> category, longest prefix wins
INSTANCE_FAMILY_CATEGORIES = {
    "m": "general_purpose",
    "t": "general_purpose",
    "a": "general_purpose",
    "mac": "general_purpose",
    "c": "compute_optimized",
    "hpc": "compute_optimized",
    "r": "memory_optimized",
    "x": "memory_optimized",
    "z": "memory_optimized",
    "u": "memory_optimized",
    "p": "accelerated_computing",
    "g": "accelerated_computing",
    "dl": "accelerated_computing",
    "inf": "accelerated_computing",
    "trn": "accelerated_computing",
    "f": "accelerated_computing",
    "vt": "accelerated_computing",
    "i": "storage_optimized",
    "d": "storage_optimized",
    "h": "storage_optimized",
    "im": "storage_optimized",
    "is": "storage_optimized",
}

# File and Directory Constants
DEFAULT_LOG_PATH = "logs"
DEFAULT_CONSOLE_LOG_LEVEL = "WARNING"
