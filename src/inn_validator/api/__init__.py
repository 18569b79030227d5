"""inn_validator.api — HTTP-роутеры валидатора."""
