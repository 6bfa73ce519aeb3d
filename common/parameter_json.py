from common.generate_parameter import Generate


class Parameter:

    @staticmethod
    def person_parameters(rng=None):
        person_json = {
            "name": Generate.generate_chinese_name(allow_double_surname=True, rng=rng),
            "id_card": Generate.generate_identity_code(18, rng=rng),
            "phone": Generate.generate_random_phone_number(rng=rng),
            "email": Generate.generate_random_email(rng=rng),
            "address": Generate.generate_random_address(rng=rng)
        }
        return person_json

    @staticmethod
    def company_parameters(allow_complex=False, rng=None):
        company_json = {
            "company_name": Generate.generate_random_company_name(allow_complex, rng=rng),
            "credit_code": Generate.generate_credit_code(rng=rng),
            "legal_person": Generate.generate_chinese_name(rng=rng),
            "contact_phone": Generate.generate_random_phone_number(rng=rng),
            "email": Generate.generate_random_email(rng=rng),
            "address": Generate.generate_random_address(detailed=True, rng=rng)
        }
        return company_json
