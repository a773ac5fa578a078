"""
Tests for framework-free domain types: classification helpers, the
attribute value slot, catalog payload and ERP envelope.
"""
from datetime import datetime, timezone

from django.test import SimpleTestCase

from domain.catalog.entities import BrandRef, CatalogItemPayload, ModelRef, Parameter
from domain.erp.messages import ErpEnvelope, extract_user_update
from domain.shared.value_objects import (
    AttributeType,
    BooleanSlot,
    NumberSlot,
    SelectSlot,
    TextSlot,
    build_slot,
    is_feed_yes,
    is_numeric,
    parse_truthy,
)


class ClassificationTests(SimpleTestCase):

    def test_numeric_strings(self):
        for value in ['10', '-3.5', '+2', '.5', '1e3', ' 42 ', '7.']:
            self.assertTrue(is_numeric(value), value)

    def test_non_numeric_strings(self):
        for value in ['', 'abc', '10 см', '1,5', '--1', None]:
            self.assertFalse(is_numeric(value), value)

    def test_classify_new_attribute(self):
        self.assertEqual(AttributeType.classify('350'), AttributeType.NUMBER)
        self.assertEqual(AttributeType.classify('Керамика'), AttributeType.STRING)

    def test_truthy_set_is_case_insensitive(self):
        for value in ['да', 'Да', 'YES', 'true', '1', 'On', ' yes ']:
            self.assertTrue(parse_truthy(value), value)
        for value in ['нет', 'no', '0', '', 'y', None]:
            self.assertFalse(parse_truthy(value), value)

    def test_feed_flag_needs_exact_literal(self):
        self.assertTrue(is_feed_yes('Да'))
        self.assertFalse(is_feed_yes('да'))
        self.assertFalse(is_feed_yes('Yes'))
        self.assertFalse(is_feed_yes(''))


class BuildSlotTests(SimpleTestCase):

    def test_select_uses_resolver(self):
        slot = build_slot(AttributeType.SELECT, 'Красный', lambda raw: f'id:{raw}')
        self.assertEqual(slot, SelectSlot(attribute_value_id='id:Красный'))

    def test_boolean(self):
        self.assertEqual(build_slot('boolean', 'Yes', None), BooleanSlot(True))
        self.assertEqual(build_slot('boolean', 'нет', None), BooleanSlot(False))

    def test_number_parses_when_numeric(self):
        self.assertEqual(build_slot('number', '12.5', None), NumberSlot(12.5))

    def test_number_falls_back_to_text(self):
        self.assertEqual(build_slot('number', 'около 12', None), TextSlot('около 12'))

    def test_string(self):
        self.assertEqual(build_slot('string', '350', None), TextSlot('350'))


class CatalogItemPayloadTests(SimpleTestCase):

    def test_flags(self):
        payload = CatalogItemPayload(external_id='x', novelty='Да', marked='нет', for_marketplaces='Да')
        self.assertTrue(payload.is_new)
        self.assertFalse(payload.is_marked)
        self.assertFalse(payload.is_liquidation)
        self.assertTrue(payload.is_for_marketplaces)

    def test_queue_form_restores_payload(self):
        payload = CatalogItemPayload(
            external_id='uid-1',
            name='Товар',
            brand=BrandRef(uid='b', name='B'),
            model=ModelRef(uid='m', name='M', group_code='G'),
            parameters=[Parameter(name='Цвет', value='Синий')],
            barcodes=['1'],
        )
        self.assertEqual(CatalogItemPayload.from_dict(payload.to_dict()), payload)

    def test_from_dict_tolerates_missing_keys(self):
        payload = CatalogItemPayload.from_dict({'external_id': 'uid-2'})
        self.assertEqual(payload.external_id, 'uid-2')
        self.assertEqual(payload.parameters, [])
        self.assertFalse(payload.brand.is_complete)
        self.assertIsNone(payload.description_html)

    def test_parameter_completeness(self):
        self.assertTrue(Parameter('Вес', '0').is_complete)
        self.assertFalse(Parameter('Вес', '').is_complete)
        self.assertFalse(Parameter('', '10').is_complete)


class ErpEnvelopeTests(SimpleTestCase):

    def test_message_shape(self):
        ts = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        envelope = ErpEnvelope(
            event='CompanyCreated',
            entity_key='company',
            snapshot={'id': 'c1'},
            timestamp=ts,
            extra={'user': {'id': 'u1', 'erp_id': None}},
        )
        self.assertEqual(envelope.to_message(), {
            'event': 'CompanyCreated',
            'timestamp': '2024-05-01T12:00:00+00:00',
            'company': {'id': 'c1'},
            'user': {'id': 'u1', 'erp_id': None},
        })

    def test_extra_never_overrides_envelope_keys(self):
        envelope = ErpEnvelope(event='E', entity_key='order', snapshot={}, extra={'event': 'X'})
        self.assertEqual(envelope.to_message()['event'], 'E')


class ExtractUserUpdateTests(SimpleTestCase):

    def test_full_update(self):
        update = extract_user_update({'user': {'id': 'u1'}, 'erp_id': 42, 'status': 'confirmed'})
        self.assertEqual(update, {'user_id': 'u1', 'erp_id': '42', 'status': 'confirmed'})

    def test_status_is_optional(self):
        update = extract_user_update({'user': {'id': 'u1'}, 'erp_id': 'E-1'})
        self.assertIsNone(update['status'])

    def test_missing_identity_is_ignored(self):
        self.assertIsNone(extract_user_update({'user': {}, 'erp_id': 'E-1'}))
        self.assertIsNone(extract_user_update({'user': {'id': 'u1'}}))
        self.assertIsNone(extract_user_update({'user': 'u1', 'erp_id': 'E-1'}))
        self.assertIsNone(extract_user_update(['not', 'a', 'dict']))
