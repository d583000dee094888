"""WhatsApp contact link for the product detail view."""

from urllib.parse import quote

from ..common.constants import DEFAULT_CONTACT_MESSAGE, WHATSAPP_URL
from ..models import Product


class _TemplateFields(dict):
    """Leaves unknown {placeholders} in the message as written."""

    def __missing__(self, key):
        return "{" + key + "}"


def build_contact_message(product: Product, template: str = DEFAULT_CONTACT_MESSAGE) -> str:
    return template.format_map(
        _TemplateFields(name=product.name, brand=product.brand, price=product.price)
    )


def build_contact_link(
    product: Product,
    number: str,
    template: str = DEFAULT_CONTACT_MESSAGE,
) -> str:
    """
    Build the wa.me link whose message mentions name, brand and price.

    The message is encoded like encodeURIComponent so the link works in
    any browser.
    """
    text = quote(build_contact_message(product, template), safe="-_.!~*'()")
    digits = "".join(ch for ch in str(number) if ch.isdigit())
    return WHATSAPP_URL.format(number=digits, text=text)
