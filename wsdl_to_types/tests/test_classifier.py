from wsdl_to_types.pipeline.fragment import Branch, SchemaNodeClassifier


def classify(raw, fallback_name=""):
    return SchemaNodeClassifier().classify(raw, fallback_name=fallback_name)


class TestShapeNormalization:
    """Single-or-list properties always reach the builder as lists"""

    def test_single_element_becomes_list(self):
        fragment = classify(
            {
                "@name": "Foo",
                "xs:sequence": {"xs:element": {"@name": "bar", "@type": "xs:string", "@minOccurs": "0"}},
            }
        )
        assert fragment.name == "Foo"
        assert fragment.branches == [Branch.SEQUENCE]
        assert len(fragment.groups) == 1
        [element] = fragment.groups[0].elements
        assert element.name == "bar"
        assert element.type_ref == "xs:string"
        assert element.min_occurs == "0"
        assert element.max_occurs is None

    def test_revived_scalars_are_text(self):
        fragment = classify(
            {
                "@name": "Foo",
                "xs:sequence": {"xs:element": [{"@name": "a", "@type": "xs:int", "@minOccurs": 0, "@maxOccurs": 5}]},
            }
        )
        element = fragment.groups[0].elements[0]
        assert element.min_occurs == "0"
        assert element.max_occurs == "5"

    def test_single_enumeration_value(self):
        fragment = classify(
            {
                "@name": "Mixed",
                "xs:restriction": {"@base": "xs:token", "xs:enumeration": {"@value": "Only"}},
            }
        )
        assert [v.value for v in fragment.enumeration.values] == ["Only"]

    def test_name_falls_back_to_file_name(self):
        fragment = classify({"xs:sequence": {"xs:element": []}}, fallback_name="FromFile")
        assert fragment.name == "FromFile"


class TestBranchDetection:
    def test_enumeration(self):
        fragment = classify(
            {
                "@name": "X",
                "xs:restriction": {
                    "@base": "xs:string",
                    "xs:enumeration": [
                        {"@value": "A", "xs:annotation": {"xs:documentation": "first"}},
                        {"@value": "B"},
                        {"@value": 3},
                        {"@value": True},
                    ],
                },
            }
        )
        assert fragment.is_enumeration
        assert fragment.branches == [Branch.ENUMERATION]
        assert fragment.enumeration.base == "xs:string"
        assert [v.value for v in fragment.enumeration.values] == ["A", "B", "3", "true"]
        assert fragment.enumeration.values[0].annotation == {"xs:documentation": "first"}
        assert fragment.restriction is None

    def test_restriction_without_enumeration(self):
        fragment = classify({"@name": "ItemIDType", "xs:restriction": {"@base": "xs:string", "xs:maxLength": {"@value": 19}}})
        assert not fragment.is_enumeration
        assert fragment.branches == [Branch.RESTRICTION]
        assert fragment.restriction.base == "xs:string"

    def test_complex_content_extension(self):
        fragment = classify(
            {
                "@name": "GetItemRequestType",
                "xs:complexContent": {
                    "xs:extension": {
                        "@base": "ns:AbstractRequestType",
                        "xs:sequence": {"xs:element": {"@name": "ItemID", "@type": "ns:ItemIDType"}},
                    }
                },
            }
        )
        assert fragment.branches == [Branch.COMPLEX_CONTENT]
        extension = fragment.complex_extension
        assert extension.base == "ns:AbstractRequestType"
        assert [e.name for g in extension.groups for e in g.elements] == ["ItemID"]

    def test_simple_content_extension(self):
        fragment = classify(
            {
                "@name": "AmountType",
                "xs:simpleContent": {
                    "xs:extension": {
                        "@base": "xs:double",
                        "xs:attribute": {"@name": "currencyID", "@type": "ns:CurrencyCodeType", "@use": "required"},
                    }
                },
            }
        )
        assert fragment.branches == [Branch.SIMPLE_CONTENT]
        assert fragment.simple_extension.base == "xs:double"
        [attribute] = fragment.simple_extension.attributes
        assert attribute.name == "currencyID"
        assert attribute.use == "required"

    def test_several_branches_at_once(self):
        fragment = classify(
            {
                "@name": "Everything",
                "xs:attribute": [{"@name": "a", "@type": "xs:string"}],
                "xs:sequence": {"xs:element": {"@name": "s", "@type": "xs:string"}},
                "xs:complexContent": {"xs:extension": {"@base": "ns:Base"}},
                "xs:restriction": {"@base": "xs:string"},
                "xs:simpleContent": {"xs:extension": {"@base": "xs:string"}},
            }
        )
        assert fragment.branches == [
            Branch.COMPLEX_CONTENT,
            Branch.SEQUENCE,
            Branch.RESTRICTION,
            Branch.SIMPLE_CONTENT,
            Branch.ATTRIBUTES,
        ]

    def test_choice_and_all_groups(self):
        fragment = classify(
            {
                "@name": "Foo",
                "xs:sequence": {
                    "xs:element": {"@name": "first", "@type": "xs:string"},
                    "xs:choice": {
                        "xs:element": [
                            {"@name": "byId", "@type": "xs:string"},
                            {"@name": "bySku", "@type": "xs:string"},
                        ]
                    },
                    "xs:any": {"@processContents": "lax"},
                },
                "xs:all": {"xs:element": {"@name": "extra", "@type": "xs:int"}},
            }
        )
        assert [g.compositor for g in fragment.groups] == ["sequence", "all"]
        sequence = fragment.groups[0]
        assert [(e.name, e.in_choice) for e in sequence.elements] == [
            ("first", False),
            ("byId", True),
            ("bySku", True),
        ]
        assert sequence.has_any
        assert not fragment.groups[1].has_any

    def test_documentation_is_kept_raw(self):
        annotation = {"xs:documentation": "Doc"}
        fragment = classify({"@name": "Foo", "xs:annotation": annotation})
        assert fragment.annotation == annotation
        assert fragment.branches == []


class TestMalformedShapes:
    """Shape errors are recorded against their branch only"""

    def test_malformed_sequence_keeps_other_branches(self):
        fragment = classify(
            {
                "@name": "Broken",
                "xs:sequence": "not an object",
                "xs:attribute": {"@name": "id", "@type": "xs:string"},
            }
        )
        assert set(fragment.errors) == {Branch.SEQUENCE}
        assert fragment.branches == [Branch.SEQUENCE, Branch.ATTRIBUTES]
        assert [a.name for a in fragment.attributes] == ["id"]

    def test_non_object_members_are_kept_for_the_builder(self):
        fragment = classify({"@name": "Foo", "xs:sequence": {"xs:element": ["oops", {"@name": "ok", "@type": "xs:string"}]}})
        elements = fragment.groups[0].elements
        assert elements[0].name is None
        assert elements[0].raw == "oops"
        assert elements[1].name == "ok"

    def test_unreadable_enumeration_degrades_to_restriction(self):
        fragment = classify(
            {
                "@name": "BadEnum",
                "xs:restriction": {"@base": "xs:token", "xs:enumeration": [{"@value": "A"}, {"xs:annotation": {}}]},
            }
        )
        assert not fragment.is_enumeration
        assert Branch.ENUMERATION in fragment.errors
        assert fragment.restriction.base == "xs:token"
        assert fragment.branches == [Branch.ENUMERATION, Branch.RESTRICTION]

    def test_complex_content_without_extension(self):
        fragment = classify({"@name": "Foo", "xs:complexContent": {"xs:restriction": {"@base": "ns:Bar"}}})
        assert Branch.COMPLEX_CONTENT in fragment.errors
        assert fragment.complex_extension is None
