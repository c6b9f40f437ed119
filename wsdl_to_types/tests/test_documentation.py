from unittest import TestCase

from wsdl_to_types.pipeline.documentation import extract_documentation


class TestExtractDocumentation(TestCase):
    """Test flattening of annotation nodes into one documentation line"""

    def test_plain_string(self):
        annotation = {"xs:documentation": "Unique identifier of a listing."}
        self.assertEqual(extract_documentation(annotation), "Unique identifier of a listing.")

    def test_line_breaks_and_indentation_are_collapsed(self):
        annotation = {"xs:documentation": "\n    Base type of all\n        request payloads.\n  "}
        self.assertEqual(extract_documentation(annotation), "Base type of all request payloads.")

    def test_structured_node_puts_text_first(self):
        annotation = {
            "xs:documentation": {
                "@source": "api-docs",
                "#text": "Main text\n   continued.",
                "Note": "Extra note.",
                "Count": 3,
            }
        }
        self.assertEqual(extract_documentation(annotation), "Main text continued. api-docs Extra note.")

    def test_list_of_documentation_nodes(self):
        annotation = {"xs:documentation": ["First part.", {"#text": "Second part."}]}
        self.assertEqual(extract_documentation(annotation), "First part. Second part.")

    def test_missing_documentation(self):
        self.assertIsNone(extract_documentation(None))
        self.assertIsNone(extract_documentation({}))
        self.assertIsNone(extract_documentation({"xs:appinfo": {"CallInfo": "x"}}))
        self.assertIsNone(extract_documentation("not an annotation node"))

    def test_blank_documentation(self):
        self.assertIsNone(extract_documentation({"xs:documentation": "  \n   "}))
        self.assertIsNone(extract_documentation({"xs:documentation": {"#text": 12}}))

    def test_comment_terminator_is_neutralized(self):
        annotation = {"xs:documentation": "Matches a/*/b paths."}
        result = extract_documentation(annotation)
        self.assertNotIn("*/", result)
        self.assertEqual(result, "Matches a/*\\/b paths.")

    def test_custom_schema_prefix(self):
        annotation = {"xsd:documentation": "Documented."}
        self.assertEqual(extract_documentation(annotation, schema_prefix="xsd"), "Documented.")
        self.assertIsNone(extract_documentation(annotation))
