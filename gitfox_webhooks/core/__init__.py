# Core domain types, errors and configuration
