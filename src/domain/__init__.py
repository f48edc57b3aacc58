"""Domain layer - Pure business logic.

Contains the permission catalog, role entities, value objects, the
predefined role table and protocols (ports). The domain layer has NO
dependencies on any framework or infrastructure - it is pure Python.

Structure:
- enums/: Permission catalog and role-related enums
- entities/: Role, UserRole, MerchantAccount
- value_objects/: RoleName, RoleInfo
- roles/: Predefined role table
- validators/: Role definition validators
- errors/: UserRoleError
- protocols/: Repository and cache ports
"""
