"""Numeral and currency verbalization for text-to-speech output

Converts integers and currency amounts to spoken words per language, and
rewrites "$1,234.50"-style tokens inside composed answers so the synthesizer
reads them out naturally:
    "$1,500" → "mil quinientos pesos"
    "$21.01" → "twenty one dollars and one cent"
"""

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Tuple, Union

Amount = Union[int, float, Decimal]

# "$" + digits with optional ",ddd" thousands groups and optional decimals
CURRENCY_TOKEN = re.compile(r"\$(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?")


def split_amount(amount: Amount) -> Tuple[int, int]:
    """Split a non-negative amount into (integer part, cents), rounding cents half-up"""
    value = Decimal(str(amount))
    if value < 0:
        raise ValueError(f"Cannot verbalize negative amount: {amount}")

    integer_part = int(value)
    cents = int(((value - integer_part) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

    # 1.999 rounds up to a whole unit
    if cents == 100:
        integer_part += 1
        cents = 0

    return integer_part, cents


class NumeralSpeller:
    """Base speller: subclasses provide number_to_words and the currency nouns"""

    currency_singular = ""
    currency_plural = ""
    cent_singular = ""
    cent_plural = ""
    cents_joiner = ""

    def number_to_words(self, n: int) -> str:
        raise NotImplementedError

    def currency_to_words(self, amount: Amount) -> str:
        integer_part, cents = split_amount(amount)

        result = self.number_to_words(integer_part)
        result += " " + (self.currency_singular if integer_part == 1 else self.currency_plural)

        if cents > 0:
            result += f" {self.cents_joiner} " + self.number_to_words(cents)
            result += " " + (self.cent_singular if cents == 1 else self.cent_plural)

        return result


class SpanishNumeralSpeller(NumeralSpeller):
    """Spanish numerals with peso/centavo currency nouns"""

    currency_singular = "peso"
    currency_plural = "pesos"
    cent_singular = "centavo"
    cent_plural = "centavos"
    cents_joiner = "con"

    UNITS = ["", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve"]
    TEENS = [
        "diez", "once", "doce", "trece", "catorce", "quince",
        "dieciséis", "diecisiete", "dieciocho", "diecinueve",
    ]
    TENS = ["", "", "veinte", "treinta", "cuarenta", "cincuenta", "sesenta", "setenta", "ochenta", "noventa"]
    HUNDREDS = [
        "", "ciento", "doscientos", "trescientos", "cuatrocientos", "quinientos",
        "seiscientos", "setecientos", "ochocientos", "novecientos",
    ]

    def _hundreds(self, n: int) -> str:
        if n == 0:
            return ""
        if n == 100:
            return "cien"

        words = []
        h, remainder = divmod(n, 100)
        if h > 0:
            words.append(self.HUNDREDS[h])

        if remainder > 0:
            if remainder < 10:
                words.append(self.UNITS[remainder])
            elif remainder < 20:
                words.append(self.TEENS[remainder - 10])
            else:
                t, u = divmod(remainder, 10)
                if t == 2 and u > 0:
                    words.append("veinti" + self.UNITS[u])
                elif u > 0:
                    words.append(f"{self.TENS[t]} y {self.UNITS[u]}")
                else:
                    words.append(self.TENS[t])

        return " ".join(words)

    def _thousands(self, n: int) -> str:
        if n == 0:
            return "cero"

        thousands, remainder = divmod(n, 1000)
        words = []
        if thousands == 1:
            words.append("mil")
        elif thousands > 1:
            words.append(self._hundreds(thousands) + " mil")

        if remainder > 0:
            words.append(self._hundreds(remainder))

        return " ".join(words)

    def number_to_words(self, n: int) -> str:
        if n < 0:
            raise ValueError(f"Cannot verbalize negative number: {n}")
        if n == 0:
            return "cero"
        if n == 1:
            return "un"

        # Long scale: a billón is a million millions
        if n >= 1_000_000_000_000:
            billions, remainder = divmod(n, 1_000_000_000_000)
            result = "un billón" if billions == 1 else self.number_to_words(billions) + " billones"
            if remainder > 0:
                result += " " + self.number_to_words(remainder)
            return result

        if n >= 1_000_000:
            millions, remainder = divmod(n, 1_000_000)
            result = "un millón" if millions == 1 else self._thousands(millions) + " millones"
            if remainder > 0:
                result += " " + self._thousands(remainder)
            return result

        return self._thousands(n)


class EnglishNumeralSpeller(NumeralSpeller):
    """English numerals with dollar/cent currency nouns"""

    currency_singular = "dollar"
    currency_plural = "dollars"
    cent_singular = "cent"
    cent_plural = "cents"
    cents_joiner = "and"

    UNITS = ["", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]
    TEENS = [
        "ten", "eleven", "twelve", "thirteen", "fourteen",
        "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
    ]
    TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]
    SCALES = ((10**12, "trillion"), (10**9, "billion"), (1_000_000, "million"), (1000, "thousand"), (100, "hundred"))

    def number_to_words(self, n: int) -> str:
        if n < 0:
            raise ValueError(f"Cannot verbalize negative number: {n}")
        if n == 0:
            return "zero"
        if n < 10:
            return self.UNITS[n]
        if n < 20:
            return self.TEENS[n - 10]
        if n < 100:
            t, u = divmod(n, 10)
            return self.TENS[t] + (" " + self.UNITS[u] if u > 0 else "")

        for size, label in self.SCALES:
            if n >= size:
                head, remainder = divmod(n, size)
                words = f"{self.number_to_words(head)} {label}"
                if remainder > 0:
                    words += " " + self.number_to_words(remainder)
                return words

        raise AssertionError("unreachable")


def format_for_speech(text: str, speller: NumeralSpeller) -> str:
    """Replace every currency token in text with its spoken rendering"""

    def _speak(match: "re.Match[str]") -> str:
        raw = match.group(0).replace("$", "").replace(",", "")
        return speller.currency_to_words(Decimal(raw))

    return CURRENCY_TOKEN.sub(_speak, text)


def format_number(value: float) -> str:
    """Render a computed number the way it reads on screen: 15 not 15.0"""
    if float(value).is_integer() and abs(value) < 1e15:
        return str(int(value))
    return repr(value)


def format_amount(value: float) -> str:
    """Money with thousands separators and at most two decimals: 1,234.5"""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")
