from typing import List


class PasswordValidator:
    MIN_LENGTH = 8
    MIN_UPPERCASE = 1
    MIN_LOWERCASE = 1
    MIN_DIGITS = 1

    WEAK_PASSWORDS = {
        'password', 'password123', '12345678', 'qwerty123', 'letmein123',
        'welcome123', '123456789', 'jobboard123',
    }

    @classmethod
    def validate_password_strength(cls, password: str) -> tuple[bool, List[str]]:
        errors = []

        if len(password) < cls.MIN_LENGTH:
            errors.append(f"Password must be at least {cls.MIN_LENGTH} characters long")

        if sum(1 for c in password if c.isupper()) < cls.MIN_UPPERCASE:
            errors.append(f"Password must contain at least {cls.MIN_UPPERCASE} uppercase letter(s)")

        if sum(1 for c in password if c.islower()) < cls.MIN_LOWERCASE:
            errors.append(f"Password must contain at least {cls.MIN_LOWERCASE} lowercase letter(s)")

        if sum(1 for c in password if c.isdigit()) < cls.MIN_DIGITS:
            errors.append(f"Password must contain at least {cls.MIN_DIGITS} digit(s)")

        if password.lower() in cls.WEAK_PASSWORDS:
            errors.append("Password is too common and easily guessable")

        return len(errors) == 0, errors
