EXIT_OK = 0  # Coverage meets every configured minimum
EXIT_FAILURE = 1  # Missing report, bad minimum, or coverage below a minimum
