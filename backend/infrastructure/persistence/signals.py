"""
ORM signal wiring.

Turns user / company / order lifecycle changes into domain events and
hands them to the ERP listeners once the surrounding transaction has
committed. Deletions are snapshotted immediately, while related rows
still exist.
"""

from django.conf import settings
from django.db import transaction
from django.db.models.signals import post_save, pre_delete
from django.dispatch import receiver

from domain.shared.events import (
    UserCreated, UserUpdated, UserDeleted,
    CompanyCreated, CompanyUpdated, CompanyDeleted,
    OrderCreated, OrderUpdated, OrderDeleted,
)

from .models import User, Company, Order


def _publishing_enabled():
    return getattr(settings, 'ERP_PUBLISH_ENABLED', False)


def _emit_after_commit(event):
    from application.erp.listeners import dispatch_domain_event

    transaction.on_commit(lambda: dispatch_domain_event(event), robust=True)


def _emit_prepared(event):
    from application.erp.listeners import prepare_domain_event

    publications = prepare_domain_event(event)
    if not publications:
        return

    def run():
        for publish in publications:
            publish()

    transaction.on_commit(run, robust=True)


def _lifecycle_event(instance, created, created_cls, updated_cls, deleted_cls):
    changes = instance.get_changes()
    instance.mark_clean()

    if created:
        return created_cls(instance=instance)
    if 'deleted_at' in changes and getattr(instance, 'deleted_at', None) is not None:
        return deleted_cls(instance=instance, changes=changes)
    return updated_cls(instance=instance, changes=changes)


# =============================================================================
# USERS
# =============================================================================

@receiver(post_save, sender=User)
def user_saved(sender, instance, created, raw=False, **kwargs):
    if raw or not _publishing_enabled():
        return
    changes = instance.get_changes()
    instance.mark_clean()
    event = UserCreated(instance=instance) if created else UserUpdated(instance=instance, changes=changes)
    _emit_after_commit(event)


@receiver(pre_delete, sender=User)
def user_deleted(sender, instance, **kwargs):
    if not _publishing_enabled():
        return
    _emit_prepared(UserDeleted(instance=instance))


# =============================================================================
# COMPANIES
# =============================================================================

@receiver(post_save, sender=Company)
def company_saved(sender, instance, created, raw=False, **kwargs):
    if raw or not _publishing_enabled():
        return
    event = _lifecycle_event(instance, created, CompanyCreated, CompanyUpdated, CompanyDeleted)
    if isinstance(event, CompanyDeleted):
        _emit_prepared(event)
    else:
        _emit_after_commit(event)


@receiver(pre_delete, sender=Company)
def company_deleted(sender, instance, **kwargs):
    if not _publishing_enabled():
        return
    _emit_prepared(CompanyDeleted(instance=instance))


# =============================================================================
# ORDERS
# =============================================================================

@receiver(post_save, sender=Order)
def order_saved(sender, instance, created, raw=False, **kwargs):
    if raw or not _publishing_enabled():
        return
    event = _lifecycle_event(instance, created, OrderCreated, OrderUpdated, OrderDeleted)
    if isinstance(event, OrderDeleted):
        _emit_prepared(event)
    else:
        _emit_after_commit(event)


@receiver(pre_delete, sender=Order)
def order_deleted(sender, instance, **kwargs):
    if not _publishing_enabled():
        return
    _emit_prepared(OrderDeleted(instance=instance))
