# Core package initialization
# Shared configuration, logging and error types for every demo
