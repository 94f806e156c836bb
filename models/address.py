"""
Address model
"""
from dataclasses import dataclass, field, fields
from typing import Dict, List


@dataclass(frozen=True)
class Address:
    """Postal address as entered by a user or returned by a postcode lookup"""

    line_1: str = ""
    line_2: str = ""
    line_3: str = ""
    building_number: str = ""
    building_name: str = ""
    sub_building_name: str = ""
    postcode: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> 'Address':
        """
        Builds an address from the lookup wire shape

        Unknown keys are ignored and missing or null values become "".
        """
        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            values[f.name] = "" if value is None else str(value)
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        """Converts the address to the lookup wire shape"""
        return {
            'line_1': self.line_1,
            'line_2': self.line_2,
            'line_3': self.line_3,
            'building_number': self.building_number,
            'building_name': self.building_name,
            'sub_building_name': self.sub_building_name,
            'postcode': self.postcode
        }

    def is_empty(self):
        """Checks whether every descriptive and identifying field is blank"""
        return not any([self.line_1, self.line_2, self.line_3, self.building_number,
                        self.building_name, self.sub_building_name])

    def get_full_address(self):
        """Returns the address as a single line"""
        parts = [p.strip() for p in (self.line_1, self.line_2, self.line_3, self.postcode)]
        return ", ".join(p for p in parts if p)

    def __str__(self):
        return self.get_full_address()


@dataclass
class AddressResult:
    """Envelope of a postcode lookup: {result: [...], code, message}"""

    result: List[Address] = field(default_factory=list)
    code: int = 0
    message: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> 'AddressResult':
        """Decodes the envelope; raises ValueError if it has the wrong shape"""
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        if 'result' not in data:
            message = data.get('message') or "no 'result' key"
            raise ValueError(f"envelope has no addresses: {message}")

        raw_result = data['result'] or []
        if not isinstance(raw_result, list):
            raise ValueError("'result' is not a list")

        addresses = []
        for item in raw_result:
            if not isinstance(item, dict):
                raise ValueError(f"address entry is not an object: {item!r}")
            addresses.append(Address.from_dict(item))

        try:
            code = int(data.get('code') or 0)
        except (TypeError, ValueError):
            raise ValueError(f"'code' is not an integer: {data.get('code')!r}") from None

        return cls(result=addresses, code=code, message=str(data.get('message') or ""))

    def to_dict(self) -> Dict:
        return {
            'result': [a.to_dict() for a in self.result],
            'code': self.code,
            'message': self.message
        }
