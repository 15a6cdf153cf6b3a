"""Response wording per language

Each phrasebook turns handler results into the sentence the assistant says.
Currency is written as "$1,234.5" here; speech formatting happens later.
"""

from typing import Sequence

from voice_gateway.domain.models import Customer, PeriodKind, Product, TimePeriod
from voice_gateway.domain.numerals import format_amount


class Phrasebook:
    """Base class; one subclass per supported language"""

    MONTHS: Sequence[str] = ()

    def month_name(self, month: int) -> str:
        return self.MONTHS[month]


class SpanishPhrasebook(Phrasebook):
    MONTHS = (
        "enero", "febrero", "marzo", "abril", "mayo", "junio",
        "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
    )
    OPERATOR_WORDS = {"+": "más", "-": "menos", "*": "por", "/": "entre"}

    @staticmethod
    def pluralize(count: float, singular: str, plural: str) -> str:
        return singular if count == 1 else plural

    @staticmethod
    def format_count(count: int, singular: str, plural: str) -> str:
        """'un producto', 'ningún producto', '3 productos'"""
        if count == 1:
            return f"un {singular}"
        if count == 0:
            return f"ningún {singular}"
        return f"{count} {plural}"

    def calculation(self, a: str, operator: str, b: str, result: str) -> str:
        return f"{a} {self.OPERATOR_WORDS[operator]} {b} es igual a {result}"

    def division_by_zero(self) -> str:
        return "No se puede dividir entre cero"

    def inventory_totals(self, count: int, units: int, value: float) -> str:
        products = self.format_count(count, "producto", "productos")
        unit_text = self.pluralize(units, "unidad", "unidades")
        return (
            f"Tienes {products} en inventario con un total de {units} {unit_text}. "
            f"El valor total es de ${format_amount(value)}"
        )

    def low_stock(self, listed: Sequence[Product], total: int, truncated: bool) -> str:
        items = ", ".join(
            f"{p.name} tiene {p.quantity} {self.pluralize(p.quantity, 'unidad', 'unidades')}" for p in listed
        )
        products = self.format_count(total, "producto", "productos")
        return f"Hay {products} con poco stock: {items}{' y más' if truncated else ''}"

    def stock_sufficient(self) -> str:
        return "Todos los productos tienen stock suficiente"

    def product_details(self, product: Product) -> str:
        unit_text = self.pluralize(product.quantity, "unidad", "unidades")
        return (
            f"{product.name}: Precio de venta ${format_amount(product.price)}, "
            f"Precio de compra ${format_amount(product.purchase_price)}, "
            f"Stock {product.quantity} {unit_text}"
        )

    def product_not_found(self, term: str) -> str:
        return f"No encontré el producto {term}"

    def overdue_payments(self, count: int, amount: float) -> str:
        payments = self.format_count(count, "pago vencido", "pagos vencidos")
        return f"Hay {payments} por un total de ${format_amount(amount)}"

    def no_overdue_payments(self) -> str:
        return "No hay pagos vencidos. ¡Todo al día!"

    def top_debtors(self, debtors: Sequence[Customer]) -> str:
        ranked = ", ".join(
            f"{i}. {c.name} debe ${format_amount(c.total_debt)}" for i, c in enumerate(debtors, start=1)
        )
        return f"Los clientes con mayor deuda son: {ranked}"

    def no_debtors(self) -> str:
        return "No hay clientes con deudas pendientes"

    def total_debt(self, customers_with_debt: int, total: float) -> str:
        customers = self.format_count(customers_with_debt, "cliente", "clientes")
        return f"Hay {customers} con deudas. El total adeudado es de ${format_amount(total)}"

    def customer_debt(self, name: str, amount: float) -> str:
        return f"{name} debe un total de ${format_amount(amount)}"

    def customer_clear(self, name: str) -> str:
        return f"{name} no tiene deudas pendientes"

    def customer_month_debt(self, name: str, amount: float, month: int) -> str:
        return f"{name} debe ${format_amount(amount)} en {self.month_name(month)}"

    def customer_month_clear(self, name: str, month: int) -> str:
        return f"{name} no tiene deudas pendientes en {self.month_name(month)}"

    def customer_not_found(self, search: str) -> str:
        return f'Cliente "{search}" no existe en la base de datos'

    def customer_totals(self, total: int, active: int) -> str:
        customers = self.format_count(total, "cliente registrado", "clientes registrados")
        active_text = "está activo" if active == 1 else "están activos"
        return f"Tienes {customers}, de los cuales {active} {active_text}"

    def period(self, period: TimePeriod) -> str:
        if period.kind == PeriodKind.DAY:
            return "de hoy"
        if period.kind == PeriodKind.WEEK:
            return "de esta semana"
        if period.kind == PeriodKind.SPECIFIC_MONTH and period.month is not None:
            return f"de {self.month_name(period.month)}"
        if period.kind in (PeriodKind.MONTH, PeriodKind.SPECIFIC_MONTH):
            return "de este mes"
        if period.kind == PeriodKind.YEAR:
            return "de este año"
        return "del inventario actual"

    def profit(self, period: TimePeriod, amount: float) -> str:
        return f"La ganancia {self.period(period)} es de ${format_amount(amount)}"

    def no_profit(self, period: TimePeriod) -> str:
        return f"No hay ganancias registradas {self.period(period)}"

    def unknown(self) -> str:
        return (
            "Puedo ayudarte con varias cosas. Intenta preguntar: "
            '"¿Cuántos productos tengo?", "¿Quién debe más?", '
            '"Calcula 150 por 8", o "¿Cuánto debe Juan Pérez?"'
        )


class EnglishPhrasebook(Phrasebook):
    MONTHS = (
        "january", "february", "march", "april", "may", "june",
        "july", "august", "september", "october", "november", "december",
    )
    OPERATOR_WORDS = {"+": "plus", "-": "minus", "*": "times", "/": "divided by"}

    @staticmethod
    def pluralize(count: float, singular: str, plural: str = "") -> str:
        if count == 1:
            return singular
        return plural or singular + "s"

    @staticmethod
    def be(count: int) -> str:
        return "is" if count == 1 else "are"

    def month_name(self, month: int) -> str:
        return self.MONTHS[month].capitalize()

    def calculation(self, a: str, operator: str, b: str, result: str) -> str:
        return f"{a} {self.OPERATOR_WORDS[operator]} {b} equals {result}"

    def division_by_zero(self) -> str:
        return "Cannot divide by zero"

    def inventory_totals(self, count: int, units: int, value: float) -> str:
        return (
            f"You have {count} {self.pluralize(count, 'product')} in inventory with a total of "
            f"{units} {self.pluralize(units, 'unit')} worth ${format_amount(value)}"
        )

    def low_stock(self, listed: Sequence[Product], total: int, truncated: bool) -> str:
        items = ", ".join(f"{p.name} has {p.quantity} {self.pluralize(p.quantity, 'unit')}" for p in listed)
        return (
            f"There {self.be(total)} {total} {self.pluralize(total, 'product')} with low stock: "
            f"{items}{' and more' if truncated else ''}"
        )

    def stock_sufficient(self) -> str:
        return "All products have sufficient stock"

    def product_details(self, product: Product) -> str:
        return (
            f"{product.name}: sale price ${format_amount(product.price)}, "
            f"purchase price ${format_amount(product.purchase_price)}, "
            f"{product.quantity} {self.pluralize(product.quantity, 'unit')} in stock"
        )

    def product_not_found(self, term: str) -> str:
        return f"I couldn't find the product {term}"

    def overdue_payments(self, count: int, amount: float) -> str:
        return (
            f"There {self.be(count)} {count} {self.pluralize(count, 'overdue payment')} "
            f"totaling ${format_amount(amount)}"
        )

    def no_overdue_payments(self) -> str:
        return "No overdue payments. Everything is up to date!"

    def top_debtors(self, debtors: Sequence[Customer]) -> str:
        ranked = ", ".join(
            f"{i}. {c.name} owes ${format_amount(c.total_debt)}" for i, c in enumerate(debtors, start=1)
        )
        return f"The customers with the most debt are: {ranked}"

    def no_debtors(self) -> str:
        return "No customers have outstanding debts"

    def total_debt(self, customers_with_debt: int, total: float) -> str:
        verb = "owes" if customers_with_debt == 1 else "owe"
        return (
            f"{customers_with_debt} {self.pluralize(customers_with_debt, 'customer')} {verb} "
            f"a total of ${format_amount(total)}"
        )

    def customer_debt(self, name: str, amount: float) -> str:
        return f"{name} owes a total of ${format_amount(amount)}"

    def customer_clear(self, name: str) -> str:
        return f"{name} has no pending debts"

    def customer_month_debt(self, name: str, amount: float, month: int) -> str:
        return f"{name} owes ${format_amount(amount)} in {self.month_name(month)}"

    def customer_month_clear(self, name: str, month: int) -> str:
        return f"{name} has no pending debts in {self.month_name(month)}"

    def customer_not_found(self, search: str) -> str:
        return f'Customer "{search}" was not found'

    def customer_totals(self, total: int, active: int) -> str:
        return f"You have {total} {self.pluralize(total, 'customer')}, {active} {self.be(active)} active"

    def period(self, period: TimePeriod) -> str:
        if period.kind == PeriodKind.DAY:
            return "today"
        if period.kind == PeriodKind.WEEK:
            return "this week"
        if period.kind == PeriodKind.SPECIFIC_MONTH and period.month is not None:
            return f"in {self.month_name(period.month)}"
        if period.kind in (PeriodKind.MONTH, PeriodKind.SPECIFIC_MONTH):
            return "this month"
        if period.kind == PeriodKind.YEAR:
            return "this year"
        return "from current inventory"

    def profit(self, period: TimePeriod, amount: float) -> str:
        return f"Profit {self.period(period)} is ${format_amount(amount)}"

    def no_profit(self, period: TimePeriod) -> str:
        return f"No profit recorded {self.period(period)}"

    def unknown(self) -> str:
        return (
            "I can help you with information about customers, debts, products, and inventory. "
            'Try asking "How many products do I have?", "How much do customers owe?", '
            'or "Calculate 25 times 8"'
        )
