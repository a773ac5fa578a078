"""
Tests for ERP inbound processing: consumer acknowledgement contract,
routing and user updates.
"""
import json
import uuid
from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.test import SimpleTestCase, TestCase, override_settings

from application.erp.inbound import route_erp_message
from application.erp.user_updates import apply_erp_user_update
from infrastructure.messaging.erp_consumer import Delivery, ErpIncomingConsumer
from infrastructure.persistence.models import User
from tests.utils import TestDataFactory


def fake_message(body):
    if isinstance(body, dict):
        body = json.dumps(body).encode('utf-8')
    return mock.Mock(body=body)


class ConsumerContractTests(SimpleTestCase):

    def setUp(self):
        self.router = mock.Mock()
        self.sleep = mock.Mock()
        self.consumer = ErpIncomingConsumer(
            mock.Mock(),
            queue_name='erp_incoming',
            router=self.router,
            requeue_delay=30,
            sleep=self.sleep,
        )

    def test_valid_message_acked(self):
        message = fake_message({'user': {'id': 'u1'}, 'erp_id': 'E1'})

        self.assertEqual(self.consumer.handle(message), Delivery.ACKED)

        self.router.assert_called_once_with({'user': {'id': 'u1'}, 'erp_id': 'E1'})
        message.ack.assert_called_once_with()
        message.requeue.assert_not_called()

    def test_invalid_json_rejected_without_requeue(self):
        message = fake_message(b'{not json')

        self.assertEqual(self.consumer.handle(message), Delivery.REJECTED)

        message.reject.assert_called_once_with(requeue=False)
        message.ack.assert_not_called()
        self.router.assert_not_called()

    def test_undecodable_body_rejected(self):
        message = fake_message(b'\xff\xfe\x00')

        self.assertEqual(self.consumer.handle(message), Delivery.REJECTED)
        message.reject.assert_called_once_with(requeue=False)

    def test_processing_error_requeued_after_delay(self):
        self.router.side_effect = RuntimeError('broker down')
        message = fake_message({'user': {'id': 'u1'}, 'erp_id': 'E1'})

        self.assertEqual(self.consumer.handle(message), Delivery.REQUEUED)

        self.sleep.assert_called_once_with(30)
        message.requeue.assert_called_once_with()
        message.ack.assert_not_called()

    def test_zero_delay_does_not_sleep(self):
        self.consumer.requeue_delay = 0
        self.router.side_effect = RuntimeError('boom')

        self.consumer.handle(fake_message({'x': 1}))

        self.sleep.assert_not_called()

    def test_one_message_in_flight(self):
        Consumer = mock.Mock()

        self.consumer.get_consumers(Consumer, mock.Mock())

        Consumer.assert_called_once_with(
            queues=[self.consumer.queue],
            on_message=self.consumer.on_message,
            prefetch_count=1,
        )
        self.assertEqual(self.consumer.queue.name, 'erp_incoming')
        self.assertTrue(self.consumer.queue.durable)


class RoutingTests(SimpleTestCase):

    @mock.patch('application.tasks.erp_tasks.process_erp_user_update.delay')
    def test_user_update_routed(self, delay):
        payload = {'user': {'id': 'u1'}, 'erp_id': 'E1'}

        self.assertEqual(route_erp_message(payload), ['user'])
        delay.assert_called_once_with(payload)

    @mock.patch('application.tasks.erp_tasks.process_erp_user_update.delay')
    def test_unknown_shape_ignored(self, delay):
        self.assertEqual(route_erp_message({'order': {'id': 'o1'}}), [])
        self.assertEqual(route_erp_message(['a', 'b']), [])
        delay.assert_not_called()


class UserUpdateTests(TestCase):

    def setUp(self):
        self.user = TestDataFactory.create_user()

    def _payload(self, **extra):
        payload = {'user': {'id': str(self.user.pk)}, 'erp_id': 'ERP-42'}
        payload.update(extra)
        return payload

    def test_erp_id_and_status_applied(self):
        self.assertTrue(apply_erp_user_update(self._payload(status='confirmed')))

        self.user.refresh_from_db()
        self.assertEqual(self.user.erp_id, 'ERP-42')
        self.assertEqual(self.user.status, 'confirmed')

    def test_reapplying_is_noop(self):
        apply_erp_user_update(self._payload(status='confirmed'))

        self.assertFalse(apply_erp_user_update(self._payload(status='confirmed')))

    def test_unknown_status_keeps_current(self):
        before = self.user.status

        apply_erp_user_update(self._payload(status='vip'))

        self.user.refresh_from_db()
        self.assertEqual(self.user.erp_id, 'ERP-42')
        self.assertEqual(self.user.status, before)

    def test_unknown_user_ignored(self):
        payload = {'user': {'id': str(uuid.uuid4())}, 'erp_id': 'ERP-1'}
        self.assertFalse(apply_erp_user_update(payload))

    def test_malformed_user_id_ignored(self):
        self.assertFalse(apply_erp_user_update({'user': {'id': 'not-a-uuid'}, 'erp_id': 'ERP-1'}))

    def test_missing_erp_id_ignored(self):
        self.assertFalse(apply_erp_user_update({'user': {'id': str(self.user.pk)}}))
        self.user.refresh_from_db()
        self.assertIsNone(self.user.erp_id)

    @override_settings(ERP_PUBLISH_ENABLED=True)
    @mock.patch('application.tasks.erp_tasks.publish_erp_message.delay')
    def test_update_not_echoed_to_erp(self, delay):
        with self.captureOnCommitCallbacks(execute=True):
            apply_erp_user_update(self._payload(status='confirmed'))

        delay.assert_not_called()


class InboundFlowTests(TestCase):

    def test_consumed_message_updates_user(self):
        user = TestDataFactory.create_user()
        consumer = ErpIncomingConsumer(mock.Mock(), requeue_delay=0)
        message = fake_message({'user': {'id': str(user.pk)}, 'erp_id': 'ERP-7', 'status': 'blocked'})

        self.assertEqual(consumer.handle(message), Delivery.ACKED)

        user = User.objects.get(pk=user.pk)
        self.assertEqual((user.erp_id, user.status), ('ERP-7', 'blocked'))


class ConsumeCommandTests(SimpleTestCase):

    @mock.patch('infrastructure.messaging.erp_consumer.ErpIncomingConsumer.run', side_effect=KeyboardInterrupt)
    def test_runs_until_interrupted(self, run):
        out = StringIO()

        call_command('consume_erp_updates', '--queue', 'erp_custom', stdout=out)

        run.assert_called_once_with()
        self.assertIn('erp_custom', out.getvalue())
        self.assertIn('Остановлено', out.getvalue())
