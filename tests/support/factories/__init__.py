"""
Test Data Factories

Factory-boy based factories for generating test data that does not need to
match a fixed record of the static test data file.

Usage:
    from tests.support.factories import CheckoutInformationFactory

    info = CheckoutInformationFactory.build()
    info = CheckoutInformationFactory.build(last_name="")

Pattern:
    - Fixed expectations live in swaglabs/data/test_data.json
    - Factories only produce free-form input such as customer details
"""

from tests.support.factories.checkout_factory import CheckoutInformationFactory

__all__ = ["CheckoutInformationFactory"]
