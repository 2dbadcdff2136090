from utils.logger.logger import Logger

class BaseEdge:
    """Edge with attributes and schema validation.

    `n_from`/`n_to` hold node IDs; the node objects themselves are bound by
    the owning network (or by `between`) and returned by `get_node1`/`get_node2`.
    """

    schema = {"e_id": int, "n_from": int, "n_to": int}

    def __init__(self, attributes):
        """Initialize with attributes dict, validate against schema and cast values."""
        Logger.log(f"start Edge __init__(self)")

        self.attributes = []
        self._node1 = None
        self._node2 = None

        for key, value in attributes.items():
            setattr(self, key, value)
            self.attributes.append(key)

        if not self.validate_attributes():
            raise ValueError("Invalid Edge attributes according to schema.")

        for key in self.attributes:
            setattr(self, key, self.safe_cast(getattr(self, key), self.schema[key]))

        Logger.log(f"end Edge __init__(self)")

    @classmethod
    def between(cls, node1, node2, e_id=0):
        """Create an edge already bound to two node objects."""
        edge = cls({"e_id": e_id, "n_from": node1.get_id(), "n_to": node2.get_id()})
        edge.bind_nodes(node1, node2)
        return edge

    def bind_nodes(self, node1, node2):
        """Attach the node objects this edge connects."""
        self._node1 = node1
        self._node2 = node2

    def get_node1(self):
        return self._node1

    def get_node2(self):
        return self._node2

    def get_id(self):
        """Return edge ID or None."""
        return getattr(self, "e_id", None)

    def get_attributes(self):
        """Return schema attributes as dict."""
        return {key: getattr(self, key) for key in self.attributes}

    def get_attribute(self, attribute_name):
        """Return attribute value or None."""
        return getattr(self, attribute_name, None)

    @staticmethod
    def safe_cast(value, expected_type):
        """Cast value to expected_type; handle common cases."""
        try:
            if expected_type == bool:
                return str(value).strip().lower() in ["true", "1", "yes"]
            if expected_type == int:
                number = float(value)
                if not number.is_integer():
                    raise ValueError()
                return int(number)
            return expected_type(value)
        except (ValueError, TypeError):
            raise ValueError(f"Invalid value: '{value}' is not of type {expected_type.__name__}")

    def set_attribute(self, attribute_name, value):
        """Set attribute value after schema/type check."""
        Logger.log(f"start set_attribute(self, {attribute_name}, {value})")
        if self.schema and attribute_name not in self.schema:
            raise ValueError(f"Invalid attribute '{attribute_name}' according to schema.")
        expected_type = self.schema.get(attribute_name, str)
        value = self.safe_cast(value, expected_type)
        setattr(self, attribute_name, value)
        if attribute_name not in self.attributes:
            self.attributes.append(attribute_name)
        Logger.log("end set_attribute(self, attribute_name, value)")

    def validate_attributes(self):
        """Return True if all set attributes are allowed by schema."""
        for attr in self.attributes:
            if self.schema and attr not in self.schema:
                return False
        return True

    @classmethod
    def get_schema(cls):
        """Return schema dict mapping attribute names to types."""
        return cls.schema

    def draw(self, context, x1, y1, x2, y2):
        """Draw the edge as a straight line between its end positions."""
        context.line(x1, y1, x2, y2)

    def __repr__(self):
        return f"{type(self).__name__}({self.get_attributes()})"
