import pytest

from memcachedcrd.types import (
    READY_CONDITION,
    READY_MESSAGE,
    STATUS_FALSE,
    STATUS_TRUE,
    Condition,
    Conditions,
    Memcached,
    MemcachedList,
    MemcachedSpec,
    ObjectMeta,
    TLSSimpleService,
)


def _simulate_ready(mc: Memcached, tls: bool = False) -> None:
    mc.status.observed_generation = mc.metadata.generation
    mc.status.conditions.mark_true(READY_CONDITION, READY_MESSAGE)
    mc.status.ready_count = mc.spec.replicas
    mc.status.server_list = [
        f"{mc.name}-{i}.{mc.name}.{mc.namespace}.svc:11211"
        for i in range(mc.spec.replicas)
    ]
    mc.status.server_list_with_inet = [
        f"inet:[{mc.name}-{i}.{mc.name}.{mc.namespace}.svc]:11211"
        for i in range(mc.spec.replicas)
    ]
    mc.status.tls_support = tls


@pytest.fixture
def memcached():
    return Memcached(
        metadata=ObjectMeta(name="memcached", namespace="openstack", generation=3),
        spec=MemcachedSpec(replicas=2),
    )


def test_not_ready_initially(memcached):
    assert memcached.is_ready() is False


def test_ready_after_simulation(memcached):
    _simulate_ready(memcached)
    assert memcached.is_ready() is True
    assert memcached.status.ready_count == 2


def test_server_list_string(memcached):
    _simulate_ready(memcached)
    assert memcached.server_list_string() == (
        "memcached-0.memcached.openstack.svc:11211,"
        "memcached-1.memcached.openstack.svc:11211"
    )


def test_server_list_quoted_string(memcached):
    _simulate_ready(memcached)
    assert memcached.server_list_quoted_string() == (
        "'memcached-0.memcached.openstack.svc:11211',"
        "'memcached-1.memcached.openstack.svc:11211'"
    )


def test_server_list_with_inet(memcached):
    _simulate_ready(memcached)
    assert memcached.server_list_with_inet_string() == (
        "inet:[memcached-0.memcached.openstack.svc]:11211,"
        "inet:[memcached-1.memcached.openstack.svc]:11211"
    )
    assert memcached.server_list_with_inet_quoted_string() == (
        "'inet:[memcached-0.memcached.openstack.svc]:11211',"
        "'inet:[memcached-1.memcached.openstack.svc]:11211'"
    )


def test_tls_support(memcached):
    _simulate_ready(memcached)
    assert memcached.tls_support() is False
    _simulate_ready(memcached, tls=True)
    assert memcached.tls_support() is True


def test_empty_quoted_list_is_empty_quotes(memcached):
    assert memcached.server_list_quoted_string() == "''"


def test_rbac_names(memcached):
    assert memcached.rbac_resource_name() == "memcached-memcached"
    assert memcached.rbac_namespace() == "openstack"


def test_rbac_conditions_set(memcached):
    memcached.rbac_conditions_set(Condition(type="ServiceAccountReady", status=STATUS_TRUE))
    assert memcached.status.conditions.is_true("ServiceAccountReady")


def test_conditions_set_replaces_same_type():
    conditions = Conditions()
    conditions.set(Condition(type="A", status=STATUS_FALSE))
    conditions.set(Condition(type="B", status=STATUS_TRUE))
    conditions.set(Condition(type="A", status=STATUS_TRUE, message="done"))
    assert [c.type for c in conditions] == ["A", "B"]
    assert conditions.get("A").message == "done"
    assert conditions.is_true("A")


def test_conditions_get_missing():
    assert Conditions().get("Missing") is None
    assert Conditions().is_true("Missing") is False


def test_mark_true_sets_message():
    conditions = Conditions()
    conditions.mark_true(READY_CONDITION, READY_MESSAGE)
    assert conditions.get(READY_CONDITION).message == READY_MESSAGE
    assert conditions.get(READY_CONDITION).status == STATUS_TRUE


def test_round_trip(memcached):
    memcached.spec.container_image = "image"
    memcached.spec.tls = TLSSimpleService(secret_name="cert-memcached-svc")
    _simulate_ready(memcached, tls=True)
    assert Memcached.from_dict(memcached.to_dict()) == memcached


def test_to_dict_header(memcached):
    data = memcached.to_dict()
    assert data["apiVersion"] == "memcached.openstack.org/v1beta1"
    assert data["kind"] == "Memcached"
    assert data["spec"]["replicas"] == 2


def test_from_dict_defaults_replicas():
    mc = Memcached.from_dict({"metadata": {"name": "m"}, "spec": {}})
    assert mc.spec.replicas == 1


def test_from_dict_rejects_wrong_kind():
    with pytest.raises(ValueError):
        Memcached.from_dict({"kind": "Service"})


def test_list_round_trip(memcached):
    other = Memcached(metadata=ObjectMeta(name="other", namespace="openstack"))
    items = MemcachedList(items=[memcached, other])
    data = items.to_dict()
    assert data["kind"] == "MemcachedList"
    assert MemcachedList.from_dict(data) == items